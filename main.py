from __future__ import annotations

from panel.demo import main

if __name__ == "__main__":
    main()
