"""Rutherford Scattering Simulator — Entry Point."""
from rutherford.application import main


if __name__ == "__main__":
    main()
