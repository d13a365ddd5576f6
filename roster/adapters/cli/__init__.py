"""Command-line interface adapters.

Provides CLI commands for querying the member dataset:
- house, sorted, title: Filtered and sorted listings
- average-salary, highest-paid: Scalar aggregates
- partition, group-by-house, house-stats: Groupings
- words: The word list exercises
"""
