"""Shift Billing package.

Turns rostered shifts into billed amounts. Organized by feature modules
(shifts, rates, holidays, billing, reports) with repository and service
layers; all money values are integer minor currency units (cents).
"""
