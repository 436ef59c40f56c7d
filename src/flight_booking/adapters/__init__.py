"""
Adapter implementations for Flight Booking.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources and storage.
"""
