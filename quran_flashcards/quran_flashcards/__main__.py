import sys

from quran_flashcards.cli import main

sys.exit(main())
