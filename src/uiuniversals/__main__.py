import sys

match sys.argv[1:]:
    case []:
        from uiuniversals.main import run

        run()
    case _:
        print("Usage: python -m uiuniversals")
