# src/tests/daynight_unit.py
from src.game.daynight import SCENES, Scene, hex_to_rgb, lerp_color, sample_cycle

W, H = 800, 350


def test_hex_and_lerp():
    assert hex_to_rgb("#a8d0ff") == (168, 208, 255)
    assert hex_to_rgb("0b2447") == (11, 36, 71)
    assert lerp_color((0, 0, 0), (255, 255, 255), 0.0) == (0, 0, 0)
    assert lerp_color((0, 0, 0), (255, 255, 255), 1.0) == (255, 255, 255)
    # halves round up
    assert lerp_color((0, 0, 0), (1, 3, 5), 0.5) == (1, 2, 3)


def test_start_of_cycle_is_first_scene():
    s = sample_cycle(0.0, W, H)
    assert s.scene == "morning" and s.next_scene == "day" and s.blend == 0.0
    assert s.top == SCENES[0].top and s.bottom == SCENES[0].bottom and s.sun == SCENES[0].sun
    assert s.sun_pos == (0, 63)


def test_midway_blend():
    s = sample_cycle(7.5, W, H)
    assert s.scene == "morning" and abs(s.blend - 0.5) < 1e-12
    assert s.top == (152, 207, 245)


def test_scene_order_and_wrap():
    names = [sample_cycle(t, W, H).scene for t in (0.0, 15.0, 30.0, 45.0, 60.0, 75.0)]
    assert names == ["morning", "day", "evening", "night", "morning", "day"]
    last = sample_cycle(45.0, W, H)
    assert last.next_scene == "morning", "night blends back into morning"


def test_sun_sweep():
    assert sample_cycle(30.0, W, H).sun_pos == (400, 63)
    quarter = sample_cycle(15.0, W, H)
    assert quarter.sun_pos == (200, round(H * 0.18 + H * 0.06))
    assert sample_cycle(0.0, W, H).sun_radius == max(10, H * 0.06)


def test_pure_in_time():
    a = sample_cycle(123.456, W, H)
    b = sample_cycle(123.456, W, H)
    assert a == b
    assert sample_cycle(123.456 + 60.0, W, H).scene == a.scene


def test_custom_scenes_and_duration():
    scenes = [Scene("a", (0, 0, 0), (0, 0, 0), (0, 0, 0)),
              Scene("b", (100, 100, 100), (200, 200, 200), (10, 10, 10))]
    s = sample_cycle(1.5, W, H, scenes=scenes, scene_duration_s=2.0)
    assert s.scene == "a" and abs(s.blend - 0.75) < 1e-12
    assert s.top == (75, 75, 75) and s.bottom == (150, 150, 150)


def test_empty_scene_list_fails_fast():
    try:
        sample_cycle(1.0, W, H, scenes=[])
    except AssertionError:
        return
    raise AssertionError("empty scene list should be rejected")


def main():
    test_hex_and_lerp()
    test_start_of_cycle_is_first_scene()
    test_midway_blend()
    test_scene_order_and_wrap()
    test_sun_sweep()
    test_pure_in_time()
    test_custom_scenes_and_duration()
    test_empty_scene_list_fails_fast()
    print("✓ day/night unit sanity passed")


if __name__ == "__main__":
    main()
