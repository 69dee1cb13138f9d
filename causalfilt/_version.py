# IMPORTANT: before release, remove the ".dev" suffix
__version__ = '0.1.0.dev'
