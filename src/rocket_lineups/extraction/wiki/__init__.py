# ABOUTME: Browser-backed page markup providers
