"""Domain layer: element models, validation and list merging."""
