"""Flocking boids: vectors, entities, groups, the flock behaviour and the scene."""