"""
Core package: the Timer state machine, its status and error types.
"""
