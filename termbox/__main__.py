# __main__.py

from .cli import main

main()
