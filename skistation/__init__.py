"""Ski station management back end (skiers, courses, pistes, subscriptions)."""
