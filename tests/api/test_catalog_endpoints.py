"""Tests for the catalogue endpoints used by the dashboard."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from backoffice.services.catalog_service import ProgramService


class TestFilieresEndpoints:
    """Tests for /api/filieres."""

    def test_crud(self, test_client, sample_program):
        created = test_client.post("/api/filieres", json=sample_program)
        assert created.status_code == 200
        filiere_id = created.json()["id"]

        assert test_client.get(f"/api/filieres/{filiere_id}").json()["nom"] == (
            sample_program["nom"]
        )

        updated = test_client.put(
            f"/api/filieres/{filiere_id}",
            json={**sample_program, "nom": "Développement Web Avancé"},
        )
        assert updated.status_code == 200
        assert updated.json() == {"message": "Filiere updated successfully", "changes": 1}

        listing = test_client.get("/api/filieres").json()
        assert [f["nom"] for f in listing] == ["Développement Web Avancé"]

        deleted = test_client.delete(f"/api/filieres/{filiere_id}")
        assert deleted.json() == {"message": "Filiere deleted successfully", "changes": 1}
        assert test_client.get("/api/filieres").json() == []

    def test_update_unknown(self, test_client, sample_program):
        response = test_client.put("/api/filieres/999", json=sample_program)

        assert response.status_code == 404
        assert response.json() == {"error": "Filiere 999 not found"}

    def test_delete_with_questions(self, test_client, sample_program):
        filiere_id = test_client.post("/api/filieres", json=sample_program).json()["id"]
        test_client.post(
            "/api/questions", json={"filiere_id": filiere_id, "bonne_reponse": "A"}
        )

        response = test_client.delete(f"/api/filieres/{filiere_id}")

        assert response.status_code == 400
        assert "existing references" in response.json()["error"]

    def test_missing_name(self, test_client):
        assert test_client.post("/api/filieres", json={}).status_code == 422

    def test_storage_failure(self, test_client):
        error = OperationalError("SELECT", {}, Exception("no such table: filieres"))

        with patch.object(ProgramService, "list_all", side_effect=error):
            response = test_client.get("/api/filieres")

        assert response.status_code == 500
        assert response.json() == {"error": "no such table: filieres"}


class TestPromotionsEndpoints:
    """Tests for /api/promotions."""

    def test_create_and_list(self, test_client, sample_program):
        filiere_id = test_client.post("/api/filieres", json=sample_program).json()["id"]
        referent_id = test_client.post(
            "/api/personnel", json={"nom": "Dubois", "prenom": "Marie"}
        ).json()["id"]

        created = test_client.post(
            "/api/promotions",
            json={
                "nom": "Promo Data 2024",
                "filiere_id": filiere_id,
                "referent_id": referent_id,
                "date_debut": "2024-02-01",
                "stage_obligatoire": None,
            },
        )
        assert created.status_code == 200

        cohort = test_client.get("/api/promotions").json()[0]
        assert cohort["filiere_nom"] == sample_program["nom"]
        assert cohort["referent_prenom"] == "Marie"
        assert cohort["date_debut"] == "2024-02-01"
        assert cohort["stage_obligatoire"] is False

    def test_update_and_delete(self, test_client):
        cohort_id = test_client.post("/api/promotions", json={"nom": "Promo"}).json()["id"]

        updated = test_client.put(
            f"/api/promotions/{cohort_id}",
            json={"nom": "Promo 2025", "stage_obligatoire": True},
        )
        deleted = test_client.delete(f"/api/promotions/{cohort_id}")

        assert updated.json()["message"] == "Promotion updated successfully"
        assert deleted.json()["message"] == "Promotion deleted successfully"
        assert test_client.delete(f"/api/promotions/{cohort_id}").status_code == 404


class TestApprenantsEndpoints:
    """Tests for /api/apprenants and /api/commentaires."""

    def test_search_and_comments(self, test_client):
        alice = test_client.post(
            "/api/apprenants",
            json={"nom": "Dupont", "prenom": "Alice", "email": "alice@email.com"},
        ).json()["id"]
        test_client.post("/api/apprenants", json={"nom": "Moreau", "prenom": "Eve"})

        found = test_client.get("/api/apprenants", params={"search": "alice"}).json()
        assert [a["id"] for a in found] == [alice]
        assert found[0]["statut"] == "inscrit"

        comment = test_client.post(
            "/api/commentaires",
            json={"apprenant_id": alice, "type": "suivi", "contenu": "Assidue"},
        )
        assert comment.status_code == 200

        comments = test_client.get(f"/api/commentaires/{alice}").json()
        assert [c["contenu"] for c in comments] == ["Assidue"]

    def test_comment_unknown_learner(self, test_client):
        response = test_client.post(
            "/api/commentaires", json={"apprenant_id": 42, "contenu": "?"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Apprenant 42 not found"}

    def test_update_learner(self, test_client):
        learner_id = test_client.post("/api/apprenants", json={"nom": "Durand"}).json()["id"]

        response = test_client.put(
            f"/api/apprenants/{learner_id}", json={"nom": "Durand", "statut": "en_cours"}
        )

        assert response.json()["message"] == "Apprenant updated successfully"
        assert test_client.get("/api/apprenants").json()[0]["statut"] == "en_cours"


class TestPersonnelEndpoints:
    """Tests for /api/personnel."""

    def test_referent_guard(self, test_client):
        staff_id = test_client.post(
            "/api/personnel", json={"nom": "Leroy", "prenom": "Pierre"}
        ).json()["id"]
        test_client.post("/api/promotions", json={"nom": "Cyber", "referent_id": staff_id})

        response = test_client.delete(f"/api/personnel/{staff_id}")

        assert response.status_code == 400
        assert "referent" in response.json()["error"]
        assert len(test_client.get("/api/personnel").json()) == 1

    def test_formations(self, test_client):
        staff_id = test_client.post("/api/personnel", json={"nom": "Martin"}).json()["id"]

        created = test_client.post(
            f"/api/personnel/{staff_id}/formations",
            json={"nom_formation": "AWS Architect", "date_obtention": "2022-09-30"},
        )
        assert created.status_code == 200

        formations = test_client.get(f"/api/personnel/{staff_id}/formations").json()
        assert formations[0]["nom_formation"] == "AWS Architect"
        assert formations[0]["date_obtention"] == "2022-09-30"

        assert test_client.get("/api/personnel/999/formations").status_code == 404

    def test_delete_staff(self, test_client):
        staff_id = test_client.post("/api/personnel", json={"nom": "Martin"}).json()["id"]

        response = test_client.delete(f"/api/personnel/{staff_id}")

        assert response.json() == {"message": "Personnel deleted successfully", "changes": 1}


class TestQuestionsEndpoints:
    """Tests for /api/questions."""

    def test_list_and_delete(self, test_client, sample_program, abc_questions):
        filiere_id = test_client.post("/api/filieres", json=sample_program).json()["id"]
        ids = [
            test_client.post("/api/questions", json=question).json()["id"]
            for question in abc_questions(filiere_id)
        ]

        listed = test_client.get(f"/api/questions/{filiere_id}").json()
        assert [q["id"] for q in listed] == ids

        assert test_client.delete(f"/api/questions/item/{ids[0]}").status_code == 200
        assert len(test_client.get(f"/api/questions/{filiere_id}").json()) == 2
        assert test_client.delete(f"/api/questions/item/{ids[0]}").status_code == 404

    def test_unknown_program(self, test_client):
        response = test_client.get("/api/questions/123")

        assert response.status_code == 200
        assert response.json() == []

    def test_correct_answer_required(self, test_client):
        response = test_client.post("/api/questions", json={"question": "Sans réponse"})
        assert response.status_code == 422


class TestStatsEndpoint:
    """Tests for /api/stats."""

    def test_stats(self, test_client, sample_program, sample_candidate):
        test_client.post("/api/filieres", json=sample_program)
        test_client.post("/api/candidatures", json=sample_candidate)

        stats = test_client.get("/api/stats").json()

        assert stats["filieres"] == 1
        assert stats["candidatures_en_attente"] == 1
        assert stats["candidatures_acceptees"] == 0
