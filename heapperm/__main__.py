from heapperm.cli import run

run()
