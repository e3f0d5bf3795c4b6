"""Tests for mapping solver responses onto data classes."""

from solver.result_parser import SolverResponse
from tests.conftest import make_solver_response


class TestFromDict:
    def test_full_response(self, solver_response_data):
        response = SolverResponse.from_dict(solver_response_data)
        assert len(response.equations) == 2
        assert response.results[1].location == "v2"
        assert response.results[1].numeric_value == "5."
        assert response.results[1].unit == "V"
        assert response.superposition[0].active_source == "V1"
        assert response.node_labels == [1, 2]
        assert response.meshes is None
        assert response.missing_fields() == []

    def test_meshes(self):
        data = make_solver_response(Malhas=[{"Descricao": "Malha 1", "Equacao": "i1*2 == 20"}])
        response = SolverResponse.from_dict(data)
        assert response.meshes[0].description == "Malha 1"
        assert response.meshes[0].equation == "i1*2 == 20"

    def test_missing_fields(self):
        response = SolverResponse.from_dict({"NosLista": []})
        assert response.missing_fields() == ["Resultados", "Equacoes"]
        assert response.results == []
        assert response.equations == []

    def test_raw_is_kept(self, solver_response_data):
        assert SolverResponse.from_dict(solver_response_data).raw == solver_response_data


class TestSuperposition:
    def test_absent_is_not_hidden(self):
        data = make_solver_response()
        del data["Superposicao"]
        response = SolverResponse.from_dict(data)
        assert response.superposition is None
        assert not response.superposition_hidden

    def test_empty_list_means_hidden(self):
        response = SolverResponse.from_dict(make_solver_response(Superposicao=[]))
        assert response.superposition == []
        assert response.superposition_hidden

    def test_by_node_pairs_labels(self):
        data = make_solver_response(
            Superposicao=[
                {"FonteAtiva": "V1", "ResultadosParciais": ["10", "5", "2.5"]},
                {"FonteAtiva": "V2", "ResultadosParciais": ["0", "1", "2"]},
            ],
            NosLista=[1, 2, 3],
        )
        steps = SolverResponse.from_dict(data).superposition_by_node()
        assert steps[0] == ("V1", [("1", "10"), ("2", "5"), ("3", "2.5")])
        assert steps[1][0] == "V2"

    def test_by_node_stops_at_shorter_list(self):
        data = make_solver_response(NosLista=[1])
        steps = SolverResponse.from_dict(data).superposition_by_node()
        assert steps == [("V1", [("1", "10")])]


class TestToDict:
    def test_roundtrip_shape(self, solver_response_data):
        response = SolverResponse.from_dict(solver_response_data)
        assert response.to_dict() == solver_response_data

    def test_omits_absent_optional_fields(self):
        response = SolverResponse.from_dict({"Resultados": [], "Equacoes": []})
        data = response.to_dict()
        assert "Superposicao" not in data
        assert "Malhas" not in data
