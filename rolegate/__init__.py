"""rolegate: user registration, JWT login, role-gated routes and file upload."""

__version__ = "0.1.0"
