"""
Deterministic estimate math.

Pure Python. No network, no database, no AI calls.
Given rooms, their measured dimensions and a pricing config,
produce priced material + labor line items and the estimate totals.
"""
