"""
Fee Engine - School Fee & Installment Computation

Pure business rules behind the boarding school payment portal: fee lookup,
installment previews, payment plan validation, and the amounts and states
shown for backend payment records.
"""

__version__ = "0.1.0"
