"""Package data: stylesheets shipped with Notula."""
