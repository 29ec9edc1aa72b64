"""
Volunteer event recommendation engine.

Responsibilities:
- Tokenize free-text interests and earlier searches into keywords.
- Score upcoming events with weighted field matches and category synonyms.
- Fall back through category and random picks when nothing matches.
- Orchestrate fetching, history recording and the optional LLM path.
"""
