"""Module entrypoint for `python -m hex_cells`."""

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from hex_cells.play import play_hex_cells


if __name__ == "__main__":
    play_hex_cells()
