"""
Place categorization.

Responsibilities:
- Validate provider (Google Places) payloads into typed place records.
- Classify each place into eat / see with a fine-grained subtype using
  provider types and cuisine keywords.
- Decide when provider types are too ambiguous and defer to the LLM
  classifier, falling back to a safe default if it fails.
- Build the enrichment record written back to the saved place.
"""
