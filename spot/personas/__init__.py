"""
Persona engine.

Responsibilities:
- Hold the fixed persona catalog and its recommendation guidance.
- Score each persona by how many of a user's tags it shares.
- Pick a primary persona and, when the runner-up is strong enough,
  a secondary one.
"""
