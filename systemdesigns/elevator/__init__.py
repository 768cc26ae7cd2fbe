"""Elevator system: building, floors, lifts, controllers, dispatchers and a demo."""