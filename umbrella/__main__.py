from umbrella.cli import run


run()
