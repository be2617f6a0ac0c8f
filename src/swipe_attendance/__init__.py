"""Swipe attendance package.

Turns raw access-control swipes into per-day attendance records. Organized by
feature modules (access_events, employees, leaves, regularizations, attendance)
with Protocol repositories and a thin Flask controller layer.
"""
