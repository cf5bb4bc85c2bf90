# tests/test_jellyseerr.py


def _search_results(count):
    return [
        {"id": 1000 + i, "mediaType": "movie", "title": f"Movie {i}", "releaseDate": "2001-01-01"}
        for i in range(count)
    ]


def test_search_lists_results_with_media_type_prefix(stub, call):
    stub.add("GET", "/api/v1/search", {
        "page": 1,
        "results": [
            {"id": 1396, "mediaType": "tv", "name": "Breaking Bad", "firstAirDate": "2008-01-20",
             "mediaInfo": {"status": 5}},
            {"id": 559969, "mediaType": "movie", "title": "El Camino", "releaseDate": "2019-10-11"},
        ],
    })

    result = call("jellyseerr_search", query="Breaking Bad")

    assert not result.is_error
    lines = result.text.splitlines()
    assert lines[0] == "Found 2 results:"
    items = lines[1:]
    assert len(items) == 2
    assert items[0] == "[TV] Breaking Bad (2008) - TMDB: 1396 [Partial]"
    assert items[1] == "[MOVIE] El Camino (2019) - TMDB: 559969"
    assert stub.last.url.params["query"] == "Breaking Bad"
    assert stub.last.headers["X-Api-Key"] == "jelly-key"
    assert stub.last.url.host == "jellyseerr.test"


def test_search_query_is_url_encoded(stub, call):
    stub.add("GET", "/api/v1/search", {"results": []})

    call("jellyseerr_search", query="Tom & Jerry?")

    assert stub.last.url.params["query"] == "Tom & Jerry?"
    assert stub.last.url.query.count(b"=") == 1
    assert b"%26" in stub.last.url.query
    assert b"%3F" in stub.last.url.query


def test_search_shows_at_most_fifteen_results(stub, call):
    stub.add("GET", "/api/v1/search", {"results": _search_results(18)})

    result = call("jellyseerr_search", query="movie")

    lines = result.text.splitlines()
    assert lines[0] == "Found 18 results:"
    assert len(lines) == 16


def test_search_status_labels(stub, call):
    stub.add("GET", "/api/v1/search", {"results": [
        {"id": 1, "mediaType": "movie", "title": "A", "mediaInfo": {"status": 2}},
        {"id": 2, "mediaType": "movie", "title": "B", "mediaInfo": {"status": 4}},
        {"id": 3, "mediaType": "movie", "title": "C", "mediaInfo": {"status": 1}},
        {"id": 4, "mediaType": "person", "name": "D"},
    ]})

    lines = call("jellyseerr_search", query="x").text.splitlines()

    assert lines[1].endswith("TMDB: 1 [Pending]")
    assert lines[2].endswith("TMDB: 2 [Available]")
    assert lines[3].endswith("TMDB: 3")
    assert lines[4] == "[PERSON] D () - TMDB: 4"


def test_search_result_without_id_is_malformed(stub, call):
    stub.add("GET", "/api/v1/search", {"results": [{"mediaType": "movie", "title": "A"}]})

    result = call("jellyseerr_search", query="x")

    assert result.is_error
    assert result.kind == "MalformedUpstreamResponse"


def test_request_tv_asks_for_all_seasons(stub, call):
    stub.add("POST", "/api/v1/request", {"id": 77, "status": 1})

    result = call("jellyseerr_request", tmdb_id=1396, media_type="tv")

    assert result.text == "Request created successfully. Request ID: 77"
    assert stub.last_json() == {"mediaType": "tv", "mediaId": 1396, "seasons": "all"}
    assert stub.last.headers["Content-Type"] == "application/json"


def test_request_movie_payload(stub, call):
    stub.add("POST", "/api/v1/request", {"id": 78})

    call("jellyseerr_request", tmdb_id=559969, media_type="movie")

    assert stub.last_json() == {"mediaType": "movie", "mediaId": 559969}


def test_request_without_id_echoes_response(stub, call):
    stub.add("POST", "/api/v1/request", {"message": "queued"})

    result = call("jellyseerr_request", tmdb_id=5, media_type="movie")

    assert not result.is_error
    assert result.text == 'Response: {"message": "queued"}'


def test_request_rejects_unknown_media_type(stub, call):
    result = call("jellyseerr_request", tmdb_id=5, media_type="music")

    assert result.kind == "InvalidArgument"
    assert "media_type" in result.text
    assert stub.calls == []


def test_list_requests(stub, call):
    stub.add("GET", "/api/v1/request", {"results": [
        {"id": 1, "status": 2, "media": {"mediaType": "movie", "tmdbId": 603},
         "requestedBy": {"displayName": "alice"}},
        {"id": 2, "status": 1, "media": {"mediaType": "tv", "tmdbId": 1396}},
        {"id": 3, "status": 9, "media": {"mediaType": "tv", "tmdbId": 1399}, "requestedBy": {}},
    ]})

    result = call("jellyseerr_list_requests")

    assert result.text.splitlines() == [
        "Requests (3):",
        "#1 [Approved] movie (TMDB: 603) - by alice",
        "#2 [Pending] tv (TMDB: 1396) - by Unknown",
        "#3 [] tv (TMDB: 1399) - by Unknown",
    ]
    assert stub.last.url.params["take"] == "20"


def test_list_requests_is_repeatable(stub, call):
    stub.add("GET", "/api/v1/request", {"results": [
        {"id": 1, "status": 3, "media": {"mediaType": "movie", "tmdbId": 603}},
    ]})

    first = call("jellyseerr_list_requests", limit=5)
    second = call("jellyseerr_list_requests", limit=5)

    assert first.text == second.text
    assert "[Declined]" in first.text
    assert [request.url.params["take"] for request in stub.calls] == ["5", "5"]


def test_list_requests_limit_must_be_positive(stub, call):
    result = call("jellyseerr_list_requests", limit=0)

    assert result.kind == "InvalidArgument"
    assert stub.calls == []
