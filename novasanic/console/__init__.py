"""
Artisan CLI
"""
