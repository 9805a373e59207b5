import logging
from d2c.BUILDERS.project_aggregator import ProjectAggregator
from d2c.MODELS.service_spec import ServiceSpec

def test_build_keeps_insertion_order():
    agg = ProjectAggregator(name="demo", working_dir="/srv/demo")
    for name in ["web", "db", "cache"]:
        agg.add(ServiceSpec(name=name))
    project = agg.build()
    assert project.name == "demo"
    assert project.working_dir == "/srv/demo"
    assert list(project.services) == ["web", "db", "cache"]

def test_collision_last_write_wins(caplog):
    agg = ProjectAggregator()
    agg.add(ServiceSpec(name="service-1", image="first"))
    with caplog.at_level(logging.WARNING, logger="d2c"):
        agg.add(ServiceSpec(name="service-1", image="second"))
    project = agg.build()
    assert len(project.services) == 1
    assert project.services["service-1"].image == "second"
    assert "service-1" in caplog.text
