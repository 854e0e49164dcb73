"""Domain vocabulary (enumerations) and the subscription end-date rule."""
