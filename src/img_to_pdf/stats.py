"""
Statistics tracking for a conversion run
"""


class ConversionStats:
    """Track conversion statistics"""

    def __init__(self):
        self.collected = 0
        self.skipped = 0
        self.pages = 0

    def __str__(self) -> str:
        return f"""
SUMMARY
{'='*70}
Images collected: {self.collected}
Entries skipped: {self.skipped}
Pages written: {self.pages}
"""
