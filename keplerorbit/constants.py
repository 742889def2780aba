"""
Physical and display constants for keplerorbit.

Distances are in km and times in seconds unless stated otherwise. Display
quantities are expressed in the same length units as the orbit so that the
renderer can place them in one scene.
"""

# Gravitational parameter of the Earth
MU_EARTH = 398600.4415  # km^3/s^2

# Display geometry
VECTOR_LENGTH = 2000.0  # length of the h, e and n display vectors
ANGLE_ARC_RADIUS = 1000.0  # radius of the i, w and RAAN angle wedges
ARC_SEGMENTS = 50  # segments per angle wedge
RAAN_ARC_OFFSET = 5.0  # lift of the RAAN wedge above the XY plane (avoids z-fighting)
LABEL_SCALE = 1.1  # vector labels sit just beyond the vector tip
NODE_LABEL_HEIGHT = 100.0  # z of the node vector label
AXIS_LABEL_DISTANCE = 5100.0  # distance of the X/Y/Z axis labels from the origin
AXIS_LABEL_HEIGHT = 100.0  # z of the X and Y axis labels
