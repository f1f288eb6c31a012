from vehicle_api.server import run

run()
