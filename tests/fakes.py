"""HTML pages and an HTTP session stub shared by the collins-dict tests."""

import textwrap


APPLE_PAGE = textwrap.dedent(
    """
    <html><body>
      <div class="dictionary">
        <div class="cobuild">
          <div class="title_container"><h2><span class="orth">apple</span></h2></div>
          <div class="mini_h2"><span class="orth">apple</span> <span class="pron">ˈæp.əlXXX</span></div>
          <div class="hom">
            <span class="gramGrp"><span class="pos">countable noun</span></span>
            <div class="def">An apple is a round   fruit
              with smooth skin.</div>
            <div class="quote">“I ate an apple.</div>
          </div>
        </div>
      </div>
    </body></html>
    """
)

RUN_PAGE = textwrap.dedent(
    """
    <html><body>
      <div class="cobuild">
        <div class="h2_entry">run</div>
        <div class="note"><span class="pron">rʌnABC</span></div>
        <div class="type-infl">
          <span class="orth">runs</span>
          <span class="orth">running</span>
          <span class="orth">ran</span>
        </div>
        <div class="hom">
          <span class="gramGrp pos">verb</span>
          <div class="def">When you run, you move quickly.</div>
          <div class="type-drv"><span class="orth">runner</span><span class="pos">noun</span></div>
          <div class="type-drv"><span class="orth">runner</span><span class="pos">noun</span></div>
          <div class="type-drv"><span class="orth">running</span><span class="pos">noun</span>
            <span class="quote">“Running is healthy.</span></div>
          <div class="type-drv"><span class="orth">running</span><span class="pos">noun</span></div>
          <div class="type-drv"><span class="orth">runnable</span>
            <span class="pos">adjective</span><span class="pos">informal</span></div>
          <div class="thes">
            <a class="ref">sprint</a>, <a class="ref">dash</a>, <a class="ref">race</a>
          </div>
        </div>
        <div class="hom">
          <div class="xr">See also running</div>
        </div>
        <div class="hom"><span>no definition here</span></div>
        <div class="hom"><div class="def">Never reached.</div></div>
      </div>
    </body></html>
    """
)

LABELLED_PAGE = textwrap.dedent(
    """
    <html><body>
      <div class="cobuild">
        <div class="title_container">
          <span class="orth">aardvark</span><span class="lbl">•zoology</span>
        </div>
        <div class="hom"><div class="def">A nocturnal burrowing mammal.</div></div>
      </div>
    </body></html>
    """
)

CROSS_REFERENCE_PAGE = textwrap.dedent(
    """
    <html><body>
      <div class="cobuild">
        <div class="h2_entry">ran</div>
        <div class="xr">Ran is the past tense of run.</div>
      </div>
    </body></html>
    """
)

SUGGESTION_PAGE = textwrap.dedent(
    """
    <html><body>
      <div class="suggested_words">
        <ul><li>cat</li><li> bat </li><li>rat</li></ul>
      </div>
    </body></html>
    """
)

EMPTY_PAGE = "<html><body><p>Sorry, no results.</p></body></html>"

BROKEN_ARTICLE_PAGE = textwrap.dedent(
    """
    <html><body>
      <div class="cobuild"><p>layout changed</p></div>
    </body></html>
    """
)


class FakeResponse:
    def __init__(self, status_code=200, html=""):
        self.status_code = status_code
        self.content = html.encode("utf-8")


class FakeSession:
    """Stands in for requests.Session, recording every GET."""

    def __init__(self, status_code=200, html="", error=None):
        self.headers = {}
        self.calls = []
        self.closed = False
        self._response = FakeResponse(status_code, html)
        self._error = error

    def get(self, url, params=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self._error is not None:
            raise self._error
        return self._response

    def close(self):
        self.closed = True

