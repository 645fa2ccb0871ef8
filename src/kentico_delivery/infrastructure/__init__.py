"""Infrastructure layer: network transport used by the Delivery client."""
