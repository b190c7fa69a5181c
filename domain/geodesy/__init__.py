"""Geodesy Bounded Context.

Great-circle computations on a spherical Earth:
- Value Objects: Position, Vector3, Path, BearingDefinition, EndpointDefinition
- Services: to_vector/to_point, great_circle_normal, bearing_to,
  rhumb_bearing_to, intersection_position, destination_position
"""
