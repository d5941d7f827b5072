"""
Career Companion

A job application tracker with an embedded AI assistant:
- Kanban pipeline of job applications with filters
- Resume and career preferences storage
- Gemini-powered fit analysis, cover letters, resume bullets and pitches
- Interview prep and company research
- Chat assistant that finds postings and imports jobs from links
"""

__version__ = "1.0.0"
