"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Classify places whose provider types are too ambiguous for keyword rules.
- Parse untrusted model output into a valid eat / see category.
"""
