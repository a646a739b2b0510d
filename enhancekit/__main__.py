# enhancekit/__main__.py
from enhancekit.cli.cli import main

main()
