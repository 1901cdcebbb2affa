"""Logic package for Payroll Desk.

Pure, Qt-free code: employee records, pay computation and display formatting.
"""
