"""Tests for CSV export/import endpoints."""

CSV_TEXT = (
    "Equipamento;Modelo;Unidade;KM/h Trabalhadas;Combustivel Consumido;Km/l / L/h\n"
    "104119;Ch570;Usina Norte;1.250,5;9.870,25;\n"
    "205001;CT1500;Usina Sul;640,25;2.110;3,2\n"
)


def upload(client, content: bytes, filename: str = "dados.csv"):
    return client.post(
        "/api/entries/import",
        files={"file": (filename, content, "text/csv")},
    )


class TestExport:
    """Test GET /api/entries/export."""

    def test_export_empty(self, client):
        response = client.get("/api/entries/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="equipamentos.csv"' in response.headers["content-disposition"]
        assert response.text.startswith("Equipamento;Modelo;Unidade")

    def test_export_not_shadowed_by_entry_lookup(self, client):
        """/entries/export must not be treated as an entry id."""
        assert client.get("/api/entries/export").status_code != 404

    def test_export_contains_created_entries(self, client):
        client.post("/api/entries", json={"equipamento": "X1", "combustivel": 2.5})
        lines = client.get("/api/entries/export").text.split("\n")
        assert lines[1] == "X1;;;0;2,5;"


class TestImport:
    """Test POST /api/entries/import."""

    def test_import_replaces_entries(self, client):
        client.post("/api/entries", json={"equipamento": "old"})

        response = upload(client, CSV_TEXT.encode("utf-8"))

        assert response.status_code == 200
        assert response.json() == {"imported": 2}
        entries = client.get("/api/entries").json()
        assert [e["equipamento"] for e in entries] == ["104119", "205001"]
        assert entries[0]["trabalhadas"] == 1250.5
        assert entries[0]["eficiencia"] is None
        assert entries[1]["eficiencia"] == 3.2

    def test_import_with_bom(self, client):
        response = upload(client, CSV_TEXT.encode("utf-8-sig"))
        assert response.json() == {"imported": 2}
        assert client.get("/api/entries").json()[0]["equipamento"] == "104119"

    def test_header_only_clears_entries(self, client):
        client.post("/api/entries", json={"equipamento": "old"})
        response = upload(client, CSV_TEXT.split("\n")[0].encode("utf-8"))

        assert response.json() == {"imported": 0}
        assert client.get("/api/entries").json() == []

    def test_undecodable_file_rejected(self, client):
        """A decode failure leaves the stored entries unchanged."""
        client.post("/api/entries", json={"equipamento": "old"})
        response = upload(client, b"\xff\xfe\x00\xd8bad")

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid CSV")
        assert len(client.get("/api/entries").json()) == 1

    def test_export_import_round_trip(self, client):
        upload(client, CSV_TEXT.encode("utf-8"))
        exported = client.get("/api/entries/export").content

        upload(client, exported)
        assert client.get("/api/entries/export").content == exported
