"""Input validation: identifiers, paths, profiles and repository URLs."""
