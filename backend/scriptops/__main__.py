from scriptops.main import run

run()
