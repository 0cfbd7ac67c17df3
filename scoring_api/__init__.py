"""
Scoring API Package.

Read-only HTTP surface over the decision scoring engine.
Nothing is persisted; every request is scored independently.
"""
