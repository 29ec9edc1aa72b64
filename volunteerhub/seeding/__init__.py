"""
Sample event seeding.

Responsibilities:
- Hold a small catalogue of sample volunteer events.
- Normalize them into the canonical event schema with dates relative to today.
- Persist the seeded events as CSV for the event store.
"""
