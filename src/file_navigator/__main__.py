"""Allow ``python -m file_navigator``."""
from .server import main

main()
