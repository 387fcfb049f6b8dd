"""Domain layer for bizdash: entities, validation, record services and calculators."""
