"""Worker attendance & payslip service.

Organized by feature modules (workers, attendance, payroll) with a thin Flask
controller layer over service and repository layers.
"""
