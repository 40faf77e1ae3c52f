"""In-memory task tracker with priority/date sorting and a console front end."""
