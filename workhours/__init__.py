"""Workhours Booker: single-user logging of billable work orders."""
