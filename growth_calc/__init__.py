"""
Growth Pattern Calculator

Command-line demonstration of linear (B * i) and exponential (B ^ i) growth.
Each step is printed with a one-second pacing delay and optionally appended
to a timestamped log file.
"""

__version__ = "1.0.0"
