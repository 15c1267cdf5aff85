"""
Payment method metadata resolution and form assembly.

`paymentsheet.metadata` decides which payment methods a transaction may offer and in what
order; `paymentsheet.forms` turns one of those methods into an ordered tree of form
sections for an external renderer.
"""

__all__: list[str] = []
