"""Task Management System.

Workshop scaffold: a startup banner and the shared domain vocabulary
(task status and priority, user role, project status).
"""

__version__ = "0.1.0"
