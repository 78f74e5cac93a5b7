"""In-memory payroll compliance: data types in ``models``, the service in ``system``."""

__version__ = "0.1.0"