# Routes package init
"""
Ride Service: API Routes Package
================================

Route Inventory:
    - rides.py:   POST /rides                 (record a ride)
                  GET  /rides                 (list all rides)
                  GET  /rides/page/{page}     (list one page of rides)
                  GET  /rides/{ride_id}       (get a single ride)
    - health.py:  GET  /health                (liveness probe)

Routes stay thin: they parse path/body data, call RideService, and return
the result. Validation and queries live in services/.
"""
