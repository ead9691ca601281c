"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Send food search prompts to the Groq chat completions API.
- Pull the generated text out of whatever response shape comes back.
- Report transport failures as ``AIServiceError``; an unconfigured client
  yields empty text so the search falls back to synthesized results.
"""
