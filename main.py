"""Run Fruit Frenzy from a source checkout: ``python main.py``."""

from fruit_frenzy.game import main

if __name__ == "__main__":
    main()
