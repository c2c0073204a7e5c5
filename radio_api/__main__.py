"""Run the radio API with ``python -m radio_api``."""

from radio_api.app import main

main()
