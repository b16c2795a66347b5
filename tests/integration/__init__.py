"""
Integration tests for trier.

Exercise the retry loop with the real sleeper (actual wall-clock pauses,
marked with @pytest.mark.integration).
"""
