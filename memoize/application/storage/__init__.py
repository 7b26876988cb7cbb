"""
Storage context - Application layer.

Key-value persistence ports and the index maintainer that keeps
owner-to-children id lists in step with the records they point at.
"""
