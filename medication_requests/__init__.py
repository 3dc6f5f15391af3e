"""Medication request processing.

Looks up a patient's medication request, validates stock, decrements it and
notifies the patient by email.
"""

__version__ = "0.1.0"
