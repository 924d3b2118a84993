"""Tk desktop viewer, its control panel and grid drawing helpers."""