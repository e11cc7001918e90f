"""Class Attendance package.

Pure decision core (time parsing, schedule conflicts, attendance classification)
plus feature modules (groups, schedules, enrollments, attendance) organized as
model / repository / service layers over MySQL.
"""
