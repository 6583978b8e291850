"""payment-families - interchangeable payment-gateway families.

A family is a validator, a processor and a logger built together by one
factory. PaymentService draws all three from a single factory, so a
service can never mix components of two gateways.
"""

__version__ = "0.1.0"
