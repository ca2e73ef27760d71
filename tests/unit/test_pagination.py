"""Tests for the pagination component."""

from admin_ui.components import PaginationComponent, ViewContext


def render(page, url="/admin/people?per_page=10"):
    return PaginationComponent(page=page).render_in(ViewContext(url=url))


def test_single_page_disables_both_directions(make_page, people):
    markup = render(make_page(people))

    assert markup.count('aria-disabled="true"') == 2
    assert 'aria-current="page"' in markup
    assert "href" not in markup


def test_middle_page_links_neighbours(make_page, people):
    page = make_page(people, number=5, per_page=10, total_count=100)

    markup = render(page)

    assert '<a href="/admin/people?per_page=10&amp;page=4" rel="prev"' in markup
    assert '<a href="/admin/people?per_page=10&amp;page=6" rel="next"' in markup
    assert '<span class="px-3 py-1 rounded text-3.5 font-[600] bg-gray-100" aria-current="page">5</span>' in markup


def test_page_numbers_window_with_gaps(make_page, people):
    page = make_page(people, number=5, per_page=10, total_count=100)

    assert PaginationComponent(page=page).page_numbers() == [1, None, 3, 4, 5, 6, 7, None, 10]


def test_page_numbers_near_edges(make_page, people):
    first = make_page(people, number=1, per_page=10, total_count=45)
    last = make_page(people, number=5, per_page=10, total_count=45)

    assert PaginationComponent(page=first).page_numbers() == [1, 2, 3, None, 5]
    assert PaginationComponent(page=last).page_numbers() == [1, None, 3, 4, 5]


def test_existing_page_param_is_replaced(make_page, people):
    page = make_page(people, number=2, per_page=1, total_count=2)

    markup = render(page, url="http://testserver/admin/people?page=2")

    assert 'href="/admin/people?page=1"' in markup
    assert "page=2&amp;page" not in markup


def test_past_the_end_links_back_to_last_page(make_page):
    page = make_page([], number=9, per_page=25, total_count=2)

    markup = render(page, url="/admin/users")

    assert '<a href="/admin/users?page=1" rel="prev"' in markup
    assert "page=8" not in markup
