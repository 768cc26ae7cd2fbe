"""Parking lot: vehicles, spots, managers, gates, strategies and a demo."""