import linmath as lm
from linmath.utils import init_logger, logger


def create_triangle():
    """Минимальный треугольник для отладки"""
    return [
        lm.Point(0.0, 0.0, 0.0),
        lm.Point(1.0, 0.0, 0.0),
        lm.Point(0.0, 1.0, 0.0),
    ]


if __name__ == "__main__":
    init_logger()
    logger.info("Starting minimal example...")

    # масштаб по X в 2 раза
    scale = lm.Mat3.from_cols(
        lm.Vec3(2.0, 0.0, 0.0),
        lm.Vec3(0.0, 1.0, 0.0),
        lm.Vec3(0.0, 0.0, 1.0),
    )
    offset = lm.Vec3(0.5, 0.5, 0.0)

    for p in create_triangle():
        v = scale @ lm.Vec3(p.x, p.y, p.z)
        moved = lm.Point() + v + offset
        logger.info(f"{p} -> {moved}")

    a, b = lm.Vec2(1.0, 0.0), lm.Vec2(0.0, 1.0)
    logger.info(f"Signed area (x2) of {a}, {b}: {a.perp_dot(b)}")

    normal = lm.Vec3(1.0, 0.0, 0.0).cross(lm.Vec3(0.0, 1.0, 0.0))
    logger.info(f"Normal: {normal}, length {normal.length():.3f}")
