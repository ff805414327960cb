"""
Career Hub
University career-services portal for students, employers and admins.

Architecture:
- In-memory resource stores (users, companies, jobs, events, courses)
- Key-value slots (JSON files or MongoDB) for the session and saved items
- Jinja2 resume documents
"""

__version__ = "1.0.0"
