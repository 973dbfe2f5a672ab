# ABOUTME: Static lookup data bundled with the package
# ABOUTME: Category tag table and description rewrite rules, read via importlib.resources
