"""
Multi-level feedback queue scheduler simulator.
"""
