"""Tests for target settings and the radiation pressure model factory."""

import logging

import jax.numpy as jnp
import pytest

from radjax.electromagnetism import (
    CannonballRadiationPressureTargetModel,
    CannonballTargetSettings,
    PanelSettings,
    PaneledRadiationPressureTargetModel,
    PaneledTargetSettings,
    RadiationPressureAcceleration,
    SpecularDiffuseMixReflectionLaw,
    create_radiation_pressure_acceleration,
    create_radiation_pressure_target_model,
)
from radjax.geometry import Rz


@pytest.fixture
def law():
    return SpecularDiffuseMixReflectionLaw(0.2, 0.5, 0.3)


# ===========================================================================
# Settings
# ===========================================================================
class TestCannonballTargetSettings:
    """Tests for CannonballTargetSettings."""

    def test_defaults(self):
        settings = CannonballTargetSettings()
        assert settings.reference_area == 10.0
        assert settings.radiation_pressure_coefficient == 1.3

    def test_frozen(self):
        settings = CannonballTargetSettings()
        with pytest.raises(AttributeError):
            settings.reference_area = 1.0

    def test_invalid_area(self):
        with pytest.raises(ValueError, match="reference_area"):
            CannonballTargetSettings(reference_area=-1.0)

    def test_invalid_coefficient(self):
        with pytest.raises(ValueError, match="radiation_pressure_coefficient"):
            CannonballTargetSettings(radiation_pressure_coefficient=-0.5)


class TestPanelSettings:
    """Tests for PanelSettings."""

    def test_array_normal_stored_as_tuple(self, law):
        settings = PanelSettings(1.0, jnp.array([0.0, 0.0, 1.0]), law)
        assert settings.surface_normal == (0.0, 0.0, 1.0)

    def test_callable_normal_kept(self, law):
        def normal(t):
            return jnp.array([1.0, 0.0, 0.0])

        settings = PanelSettings(1.0, normal, law)
        assert settings.surface_normal is normal

    def test_value_equality(self, law):
        a = PanelSettings(1.0, (0.0, 0.0, 1.0), law)
        b = PanelSettings(1.0, [0.0, 0.0, 1.0], SpecularDiffuseMixReflectionLaw(0.2, 0.5, 0.3))
        assert a == b

    def test_invalid_area(self, law):
        with pytest.raises(ValueError, match="area"):
            PanelSettings(0.0, (0.0, 0.0, 1.0), law)

    def test_invalid_normal(self, law):
        with pytest.raises(ValueError, match="3 components"):
            PanelSettings(1.0, (0.0, 1.0), law)

    def test_invalid_reflection_law(self):
        with pytest.raises(TypeError, match="ReflectionLaw"):
            PanelSettings(1.0, (0.0, 0.0, 1.0), "white paint")


class TestPaneledTargetSettings:
    """Tests for PaneledTargetSettings and its presets."""

    def test_list_converted_to_tuple(self, law):
        settings = PaneledTargetSettings([PanelSettings(1.0, (0.0, 0.0, 1.0), law)])
        assert isinstance(settings.panels, tuple)

    def test_empty(self):
        with pytest.raises(ValueError, match="at least one panel"):
            PaneledTargetSettings(())

    def test_invalid_element(self):
        with pytest.raises(TypeError, match="PanelSettings"):
            PaneledTargetSettings((1.0,))

    def test_sphere_total_area(self, law):
        settings = PaneledTargetSettings.sphere(2.0, 500, law)
        assert len(settings.panels) == 500
        total = sum(p.area for p in settings.panels)
        assert total == pytest.approx(4.0 * jnp.pi * 4.0, rel=1e-12)

    def test_sphere_unit_normals(self, law):
        settings = PaneledTargetSettings.sphere(1.0, 100, law)
        normals = jnp.array([p.surface_normal for p in settings.panels])
        assert jnp.allclose(jnp.linalg.norm(normals, axis=1), 1.0, atol=1e-12)

    def test_sphere_invalid_radius(self, law):
        with pytest.raises(ValueError, match="radius"):
            PaneledTargetSettings.sphere(0.0, 100, law)

    def test_box_wing_bus_only(self, law):
        settings = PaneledTargetSettings.box_wing(1.0, 2.0, 3.0, law)
        assert len(settings.panels) == 6
        assert [p.area for p in settings.panels] == [6.0, 6.0, 3.0, 3.0, 2.0, 2.0]
        assert settings.panels[0].surface_normal == (1.0, 0.0, 0.0)
        assert settings.panels[5].surface_normal == (0.0, 0.0, -1.0)

    def test_box_wing_with_solar_array(self, law):
        array_law = SpecularDiffuseMixReflectionLaw(0.8, 0.1, 0.1)
        sun = jnp.array([0.0, 1.0, 0.0])
        settings = PaneledTargetSettings.box_wing(
            1.0, 1.0, 1.0, law,
            solar_array_area=20.0,
            solar_array_reflection_law=array_law,
            sun_direction_function=lambda t: sun,
        )
        assert len(settings.panels) == 8
        front, back = settings.panels[6], settings.panels[7]
        assert front.area == back.area == 20.0
        assert front.reflection_law is array_law
        assert jnp.array_equal(front.surface_normal(0.0), sun)
        assert jnp.array_equal(back.surface_normal(0.0), -sun)

    def test_box_wing_array_defaults_to_bus_law(self, law):
        settings = PaneledTargetSettings.box_wing(
            1.0, 1.0, 1.0, law,
            solar_array_area=5.0,
            sun_direction_function=lambda t: jnp.array([1.0, 0.0, 0.0]),
        )
        assert settings.panels[6].reflection_law is law

    def test_box_wing_attitude(self, law):
        """Bus normals are rotated into the evaluation frame."""
        attitude = Rz(90.0, use_degrees=True).T
        settings = PaneledTargetSettings.box_wing(1.0, 1.0, 1.0, law, attitude_function=lambda t: attitude)
        plus_x = settings.panels[0].surface_normal(0.0)
        assert jnp.allclose(plus_x, jnp.array([0.0, 1.0, 0.0]), atol=1e-12)

    def test_box_wing_missing_sun_direction(self, law):
        with pytest.raises(ValueError, match="sun_direction_function"):
            PaneledTargetSettings.box_wing(1.0, 1.0, 1.0, law, solar_array_area=10.0)

    def test_box_wing_invalid_dimension(self, law):
        with pytest.raises(ValueError, match="length_y"):
            PaneledTargetSettings.box_wing(1.0, 0.0, 1.0, law)


# ===========================================================================
# Factory
# ===========================================================================
class TestCreateTargetModel:
    """Tests for create_radiation_pressure_target_model()."""

    def test_cannonball(self):
        model = create_radiation_pressure_target_model(CannonballTargetSettings(2.0, 1.5))
        assert isinstance(model, CannonballRadiationPressureTargetModel)
        assert model.reference_area == 2.0
        assert model.radiation_pressure_coefficient == 1.5

    def test_paneled(self, law):
        model = create_radiation_pressure_target_model(PaneledTargetSettings.box_wing(1.0, 2.0, 3.0, law))
        assert isinstance(model, PaneledRadiationPressureTargetModel)
        assert model.number_of_panels == 6

    def test_equal_laws_are_shared(self):
        """Value-equal reflection laws end up as one shared instance."""
        settings = PaneledTargetSettings((
            PanelSettings(1.0, (1.0, 0.0, 0.0), SpecularDiffuseMixReflectionLaw(0.2, 0.5, 0.3)),
            PanelSettings(1.0, (0.0, 1.0, 0.0), SpecularDiffuseMixReflectionLaw(0.2, 0.5, 0.3)),
            PanelSettings(1.0, (0.0, 0.0, 1.0), SpecularDiffuseMixReflectionLaw(1.0, 0.0, 0.0)),
        ))
        model = create_radiation_pressure_target_model(settings)
        laws = [p.reflection_law for p in model.panels]
        assert laws[0] is laws[1]
        assert laws[0] is not laws[2]

    def test_law_from_jax_scalars_is_shared(self):
        coefficients = jnp.array([0.2, 0.5, 0.3])
        settings = PaneledTargetSettings((
            PanelSettings(1.0, (1.0, 0.0, 0.0), SpecularDiffuseMixReflectionLaw(*coefficients)),
            PanelSettings(1.0, (0.0, 1.0, 0.0), SpecularDiffuseMixReflectionLaw(0.2, 0.5, 0.3)),
        ))
        model = create_radiation_pressure_target_model(settings)
        assert model.panels[0].reflection_law is model.panels[1].reflection_law

    def test_deduplication_logged(self, caplog):
        settings = PaneledTargetSettings((
            PanelSettings(1.0, (1.0, 0.0, 0.0), SpecularDiffuseMixReflectionLaw(0.2, 0.5, 0.3)),
            PanelSettings(1.0, (0.0, 1.0, 0.0), SpecularDiffuseMixReflectionLaw(0.2, 0.5, 0.3)),
        ))
        with caplog.at_level(logging.INFO, logger="radjax.electromagnetism.factory"):
            create_radiation_pressure_target_model(settings)
        assert "Deduplicated 2 reflection law instances into 1" in caplog.text

    def test_no_log_without_duplicates(self, law, caplog):
        settings = PaneledTargetSettings.box_wing(1.0, 1.0, 1.0, law)
        with caplog.at_level(logging.INFO, logger="radjax.electromagnetism.factory"):
            create_radiation_pressure_target_model(settings)
        assert "Deduplicated" not in caplog.text

    def test_fresh_model(self):
        model = create_radiation_pressure_target_model(CannonballTargetSettings())
        assert model.current_time != model.current_time

    def test_paneled_sphere_matches_cannonball(self):
        """The sphere preset reproduces the diffuse sphere coefficient."""
        radius = 1.5
        d = jnp.array([0.0, 0.6, -0.8])
        law = SpecularDiffuseMixReflectionLaw(0.0, 0.0, 1.0)
        paneled = create_radiation_pressure_target_model(PaneledTargetSettings.sphere(radius, 5000, law))
        cannonball = create_radiation_pressure_target_model(
            CannonballTargetSettings(jnp.pi * radius**2, 1.0 + 4.0 / 9.0)
        )
        paneled.update_members()
        cannonball.update_members()
        f_paneled = paneled.evaluate_radiation_pressure_force(1000.0, d)
        f_cannonball = cannonball.evaluate_radiation_pressure_force(1000.0, d)
        relative_error = jnp.linalg.norm(f_paneled - f_cannonball) / jnp.linalg.norm(f_cannonball)
        assert float(relative_error) < 5e-3

    def test_unsupported_settings(self):
        with pytest.raises(TypeError, match="Unsupported target settings"):
            create_radiation_pressure_target_model({"reference_area": 1.0})


class TestCreateAcceleration:
    """Tests for create_radiation_pressure_acceleration()."""

    def test_default_settings(self):
        acceleration = create_radiation_pressure_acceleration(
            lambda t: jnp.zeros(3),
            lambda t: jnp.array([1.0e11, 0.0, 0.0]),
            lambda t: 1000.0,
            lambda t: 100.0,
        )
        assert isinstance(acceleration, RadiationPressureAcceleration)
        model = acceleration.target_model
        assert isinstance(model, CannonballRadiationPressureTargetModel)
        assert model.reference_area == 10.0

        acceleration.update_members(0.0)
        a = acceleration.get_acceleration()
        assert float(a[0]) > 0.0

    def test_paneled_settings(self, law):
        acceleration = create_radiation_pressure_acceleration(
            lambda t: jnp.zeros(3),
            lambda t: jnp.array([1.0e11, 0.0, 0.0]),
            lambda t: 1000.0,
            lambda t: 100.0,
            PaneledTargetSettings.box_wing(1.0, 1.0, 1.0, law),
        )
        acceleration.update_members(0.0)
        a = acceleration.get_acceleration()
        assert float(a[0]) > 0.0
        assert abs(float(a[1])) < 1e-20
        assert abs(float(a[2])) < 1e-20
