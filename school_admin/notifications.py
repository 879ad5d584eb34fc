from flask import flash

SHORT = 3000
MEDIUM = 5000
LONG = 6000

def notify(title, type="info", description=None, duration=SHORT):
    """Queue a toast for the next rendered page."""
    flash({"title": title, "description": description, "duration": duration}, type)

def success(title, description=None, duration=SHORT):
    notify(title, "success", description, duration)

def error(title, description=None, duration=SHORT):
    notify(title, "error", description, duration)
