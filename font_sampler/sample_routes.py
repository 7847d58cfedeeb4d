"""Flask routes for the sample API.

This module contains the JSON route handlers for sample extraction, writing
prompts, coverage checks, sample merging and preview rendering. Importing it
registers the routes on ``sample_flask.app``.
"""

import io
import random

from flask import jsonify, request, send_file

from sample_flask import (
    MAX_PREVIEW_SIZE, MAX_PROMPT_COUNT, app, parse_drawing_param, parse_flag,
    validate_characters_param,
)
from sample_lib.domain import SampleFormatError
from sample_lib.utils import samples_to_dict
from sample_services import extract_samples, merge_sample_payload, render_preview
from writing_prompts import (
    check_prompt_coverage, get_character_group, get_character_set, get_writing_prompts,
)


@app.route('/api/extract', methods=['POST'])
def api_extract():
    data = request.get_json(silent=True)
    drawing, err = parse_drawing_param(data)
    if err:
        return err
    ok, err = validate_characters_param(data.get('characters'))
    if not ok:
        return err
    return jsonify(extract_samples(drawing, data['characters']).to_dict())


@app.route('/api/charset')
def api_charset():
    a = request.args
    group = a.get('group')
    if group is not None:
        try:
            return jsonify(characters=get_character_group(group))
        except KeyError:
            return jsonify(error=f"Unknown character group: {group}"), 404
    return jsonify(characters=get_character_set(
        include_lowercase=parse_flag(a.get('lowercase'), True),
        include_uppercase=parse_flag(a.get('uppercase')),
        include_numbers=parse_flag(a.get('numbers')),
        include_basic_punctuation=parse_flag(a.get('punctuation')),
        include_extended_punctuation=parse_flag(a.get('symbols')),
    ))


@app.route('/api/prompts')
def api_prompts():
    a = request.args
    try:
        count = int(a.get('count', 3))
        seed = a.get('seed')
        rng = random.Random(int(seed)) if seed is not None else None
    except ValueError:
        return jsonify(error="count and seed must be integers"), 400
    if not 0 < count <= MAX_PROMPT_COUNT:
        return jsonify(error=f"count must be between 1 and {MAX_PROMPT_COUNT}"), 400
    return jsonify(prompts=get_writing_prompts(
        include_lowercase=parse_flag(a.get('lowercase'), True),
        include_uppercase=parse_flag(a.get('uppercase')),
        include_numbers=parse_flag(a.get('numbers')),
        include_punctuation=parse_flag(a.get('punctuation')),
        count=count,
        rng=rng,
    ))


@app.route('/api/coverage', methods=['POST'])
def api_coverage():
    data = request.get_json(silent=True) or {}
    prompts = data.get('prompts')
    if not isinstance(prompts, list) or not all(isinstance(p, str) for p in prompts):
        return jsonify(error="Missing prompts list"), 400
    ok, err = validate_characters_param(data.get('characters'))
    if not ok:
        return err
    coverage = check_prompt_coverage(prompts, data['characters'])
    return jsonify(covered=coverage.covered, missing=coverage.missing)


@app.route('/api/samples/merge', methods=['POST'])
def api_merge_samples():
    data = request.get_json(silent=True) or {}
    characters, accepted = data.get('characters'), data.get('accepted')
    if characters is not None and not isinstance(characters, str):
        return jsonify(error="characters must be a string"), 400
    if accepted is not None and not isinstance(accepted, dict):
        return jsonify(error="accepted must be an object"), 400
    try:
        merged, remaining = merge_sample_payload(
            data.get('existing', {}), data.get('extracted', {}), characters, accepted)
    except SampleFormatError as e:
        return jsonify(error=str(e)), 400
    return jsonify(samples=samples_to_dict(merged), remaining=remaining)


@app.route('/api/preview', methods=['POST'])
def api_preview():
    data = request.get_json(silent=True)
    drawing, err = parse_drawing_param(data)
    if err:
        return err
    size = data.get('size')
    if size is not None and (not isinstance(size, int) or isinstance(size, bool)
                             or not 0 < size <= MAX_PREVIEW_SIZE):
        return jsonify(error=f"size must be an integer between 1 and {MAX_PREVIEW_SIZE}"), 400
    return send_file(io.BytesIO(render_preview(drawing, size)), mimetype='image/png')
