"""
Unit tests for trier.

Test individual components in isolation:
- Trier configuration (once-only slots, freezing, filtering)
- CounterBasedTrier retry loop (attempt counting, delays, exhaustion)
- Sleepers
- Exceptions
- Settings and logging configuration
"""
