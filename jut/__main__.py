"""Allow ``python -m jut``"""
from jut.main import main

main()
