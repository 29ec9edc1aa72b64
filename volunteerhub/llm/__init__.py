"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build prompts from the user's interests, search history and candidate events.
- Call the Groq LLM to pick events and explain each pick.
- Graceful fallback when the LLM is unavailable or returns invalid output.
"""
