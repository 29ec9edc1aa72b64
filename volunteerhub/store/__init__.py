"""
Storage layer for events, registrations and search history.

Responsibilities:
- Serve upcoming events ordered by date, plus a reduced-scope fetch used
  when the full query fails.
- Reserve volunteer spots, refusing past and full events.
- Record registrations and reject duplicates.
- Hold volunteer and organization profiles.
- Keep an append-only search history per user.
"""
