"""YouthSync package.

Student attendance recording and reporting, organized by feature modules
(attendance, reports) with a thin Flask controller layer over
service/repository layers.
"""
