"""
Developer tools for wordsplit.

Scripts in this package:
- benchmark: Time cold and warm splitting through the CLI and Python API
- debug_dp: Print the dynamic programming trace for one input
"""
