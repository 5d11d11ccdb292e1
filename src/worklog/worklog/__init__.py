"""Worklog package.

Derives a person's current work status and aggregated active time
(daily / weekly / monthly) from a log of attendance events. Organized by
feature modules (activity, aggregation, summary) with a thin Flask
controller layer on top of pure service functions.
"""
