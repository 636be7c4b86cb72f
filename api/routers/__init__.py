"""
API Routers - Organized endpoint handlers for the Camp Finder API.

Each router handles a specific domain:
- camps: Filtered camp listing, camp detail, camp save/unsave
- sessions: Session lookup by id, session save/unsave
- catalog: Interest vocabulary, week index, catalog connectivity
"""
