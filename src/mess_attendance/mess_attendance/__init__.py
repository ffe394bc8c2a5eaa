"""Mess Attendance package.

Monthly mess attendance sheets are uploaded as Excel files, parsed into one
record per student, and queried for cumulative attendance and amounts. The
package is organized by feature modules (sheets, attendance, users) with a
thin Flask controller layer over service/repository layers.
"""
