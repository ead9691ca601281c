"""
Food search pipeline.

Responsibilities:
- Validate raw search criteria before any model call is made.
- Render criteria into a prompt that restates the expected JSON shape.
- Reconcile the model's free-text output into a schema-valid result,
  synthesizing a safe default when the output cannot be used.
- Enforce the final result schema before it leaves the service.
"""
