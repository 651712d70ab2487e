from gptkit.engines import Engine, EnginesList


def test_engine_from_dict():
    engine = Engine.from_dict(
        {"id": "text-davinci-003", "object": "engine", "owner": "openai", "ready": True}
    )
    assert engine == Engine(id="text-davinci-003", object="engine", owner="openai", ready=True)


def test_engine_from_empty_dict():
    assert Engine.from_dict({"id": "", "object": "", "owner": "", "ready": False}) == Engine()


def test_engines_list_from_dict():
    engines = EnginesList.from_dict(
        {"data": [{"id": "a", "ready": True}, {"id": "b"}]}
    )
    assert [e.id for e in engines.engines] == ["a", "b"]
    assert [e.ready for e in engines.engines] == [True, False]


def test_engines_list_null_data():
    assert EnginesList.from_dict({"data": None}).engines == []