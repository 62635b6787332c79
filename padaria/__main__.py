from padaria.main import run

run()
