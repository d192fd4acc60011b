"""Transform of a player-controlled rolling ball."""

from __future__ import annotations

from dataclasses import replace

from actorengine.components import TransformComponent
from actorengine.game_input import GameInput, Key
from actorengine.quat import euler_rad_to_quat, rotate
from actorengine.vec3 import Vec3

ACCELERATION = 0.001
JUMP_SPEED = 0.01
ROT_SPEED = 0.003
MIN_POS_Y = 0.45
GRAVITY = -0.00000981
COEFFICIENT_OF_RESTITUTION = -0.5
MAX_SPEED = 0.01
DAMPING = 0.999
REST_SPEED = 0.001


class BallTransformComponent(TransformComponent):
    """A ball that drives with W/S/Q/E, turns with A/D and jumps with Space."""

    def update(self, delta_ms: float, game_input: GameInput) -> None:
        """Apply controls, gravity, bouncing and rolling for one frame."""
        acc_x = acc_z = 0.0
        ang_vel = 0.0
        vel_y_up = 0.0
        if self.pos.y == MIN_POS_Y:
            if game_input[Key.W]:
                acc_z += ACCELERATION
            if game_input[Key.S]:
                acc_z -= ACCELERATION
            if game_input[Key.Q]:
                acc_x -= ACCELERATION
            if game_input[Key.E]:
                acc_x += ACCELERATION
            if game_input[Key.SPACE]:
                vel_y_up = JUMP_SPEED
        if game_input[Key.A]:
            ang_vel -= ROT_SPEED
        if game_input[Key.D]:
            ang_vel += ROT_SPEED
        self.rot = self.rot * euler_rad_to_quat(Vec3(0.0, ang_vel * delta_ms, 0.0))

        vel_y_up = self.vel.y + vel_y_up + GRAVITY * delta_ms
        if self.pos.y <= MIN_POS_Y:
            if vel_y_up < 0.0:
                vel_y_up *= COEFFICIENT_OF_RESTITUTION
            if abs(vel_y_up) < REST_SPEED:
                vel_y_up = 0.0

        acc = Vec3(acc_x, 0.0, acc_z)
        vel = ((self.vel + acc * delta_ms) * DAMPING).clamp_mag(MAX_SPEED)
        self.vel = replace(vel, y=vel_y_up)
        self.pos = self.pos + rotate(self.vel * delta_ms, self.rot)
        if self.pos.y < MIN_POS_Y:
            self.pos = replace(self.pos, y=MIN_POS_Y)

        int_vel = self.vel * delta_ms
        self.model_rot = self.model_rot * euler_rad_to_quat(
            Vec3(int_vel.z, 0.0, -int_vel.x) * 0.5
        )