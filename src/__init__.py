"""
Core package for the conference schedule page.

Submodules provide schedule loading, enrichment, filtering, grouping, and user
interface rendering helpers that are orchestrated by the top-level `app.py`.
"""
