"""Allow running with: python -m market_dashboard"""

from .main import main

main()
