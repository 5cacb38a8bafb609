from pprint import pprint

from tarot_deck.config import load_settings, setup_logging
from tarot_deck.logic import perform_reading

if __name__ == "__main__":
    settings = load_settings()
    setup_logging(settings.log_level)

    # Example: past/present/future spread, reproducible with a seed
    result = perform_reading(
        "three_card",
        seed="demo-seed",
        reversal_probability=0.5,
        question="Should I change my career?",
        settings=settings,
    )

    pprint(result["meta"], sort_dicts=False)
    print()
    print(result["reading"]["interpretation"])
